# Modele tabel sklepu, z ktorych czytaja testy
from app.models.base import Base
from app.models.item import Item
from app.models.cart_item import CartItem
