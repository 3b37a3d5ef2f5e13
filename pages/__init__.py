from pages.base_page import BasePage, parse_price
from pages.checkout_page import CheckoutPage
from pages.cart_page import CartPage
from pages.home_page import HomePage
