# Ordering parameters (menu pricing and facade defaults)

# --- Custom pizza ---
PIZZA_BASE_PRICE = 10.99
PIZZA_TOPPING_PRICE = 1.50
PIZZA_BASE_MINUTES = 15
PIZZA_MINUTES_PER_TOPPING = 1

# --- Enhancement layers: (label, extra price, extra minutes, preparation line) ---
CHEESE_LAYER = ("Extra Cheese", 1.50, 1, "Adding extra cheese topping...")
BACON_LAYER = ("Bacon", 2.50, 2, "Adding crispy bacon strips...")
SAUCE_LAYER = ("Special Sauce", 1.00, 0, "Drizzling special house sauce...")  # added after cooking

# --- Facade (fixed values of the one-call order) ---
FACADE_ORDER_ID = 2001
FACADE_KITCHEN_NAME = "Kitchen"
FACADE_CUSTOMER_PHONE = "+1-555-9999"
FACADE_PIZZA_SAUCE = "Tomato Sauce"
FACADE_PAYPAL_EMAIL = "customer@email.com"
FACADE_PAYPAL_PASSWORD = "pass123"
FACADE_CARD_NUMBER = "4111111111111111"
FACADE_CARD_CVV = "123"
FACADE_CARD_EXPIRY = "12/26"

# --- Demo pacing (milliseconds) ---
PAUSE_SHORT_MS = 300
PAUSE_MEDIUM_MS = 500
PAUSE_LONG_MS = 1000
