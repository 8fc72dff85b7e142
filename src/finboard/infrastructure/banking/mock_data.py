"""Illustrative aggregator transactions used while no live feed is wired in.

The records use the aggregator's raw field names. All data is fictional.
"""

from decimal import Decimal
from typing import Any

MOCK_AGGREGATOR_TRANSACTIONS: tuple[dict[str, Any], ...] = (
    {
        "transaction_id": "674e8cf90018eaa45706",
        "name": "Coffee Shop",
        "payment_channel": "in_store",
        "account_id": "674e8aae003b2e6a02e3",
        "amount": Decimal("5.75"),
        "pending": False,
        "category": "Transfer",
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/4/45/A_small_cup_of_coffee.JPG",
    },
    {
        "transaction_id": "674e8cf90018eaa45707",
        "name": "Grocery Store",
        "payment_channel": "in_store",
        "account_id": "674e8c8c00294a52598f",
        "amount": Decimal("45.32"),
        "pending": False,
        "category": ["Shopping", "Groceries"],
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/1/18/Grocery_store_shelves.jpg",
    },
    {
        "transaction_id": "674e8cf90018eaa45708",
        "name": "Online Subscription",
        "payment_channel": "online",
        "account_id": "674e8aae003b2e6a02e3",
        "amount": Decimal("9.99"),
        "pending": True,
        "category": "Services",
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/e/ee/Streaming_media_apps.jpg",
    },
    {
        "transaction_id": "674e8cf90018eaa45709",
        "name": "Restaurant",
        "payment_channel": "in_store",
        "account_id": "674e8c8c00294a52598f",
        "amount": Decimal("25.89"),
        "pending": False,
        "category": "Food",
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/d/d8/Dining_out.jpg",
    },
    {
        "transaction_id": "674e8cf90018eaa45710",
        "name": "Movie Tickets",
        "payment_channel": "online",
        "account_id": "674e8aae003b2e6a02e3",
        "amount": Decimal("15.00"),
        "pending": False,
        "category": "Entertainment",
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/7/74/Movie_ticket.jpg",
    },
    {
        "transaction_id": "674e8cf90018eaa45711",
        "name": "Gas Station",
        "payment_channel": "in_store",
        "account_id": "674e8c8c00294a52598f",
        "amount": Decimal("35.76"),
        "pending": True,
        "category": "Transportation",
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/4/4d/Gas_station.jpg",
    },
    {
        "transaction_id": "674e8cf90018eaa45712",
        "name": "Gym Membership",
        "payment_channel": "online",
        "account_id": "674e8aae003b2e6a02e3",
        "amount": Decimal("49.99"),
        "pending": False,
        "category": "Fitness",
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/6/6e/Gym.jpg",
    },
    {
        "transaction_id": "674e8cf90018eaa45713",
        "name": "Bookstore",
        "payment_channel": "in_store",
        "account_id": "674e8c8c00294a52598f",
        "amount": Decimal("12.45"),
        "pending": False,
        "category": "Shopping",
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/1/1d/Bookstore_shelves.jpg",
    },
    {
        "transaction_id": "674e8cf90018eaa45714",
        "name": "Ride Share",
        "payment_channel": "online",
        "account_id": "674e8aae003b2e6a02e3",
        "amount": Decimal("18.67"),
        "pending": True,
        "category": "Transportation",
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/8/8a/Ride_sharing.jpg",
    },
    {
        "transaction_id": "674e8cf90018eaa45715",
        "name": "Pharmacy",
        "payment_channel": "in_store",
        "account_id": "674e8c8c00294a52598f",
        "amount": Decimal("8.99"),
        "pending": False,
        "category": "Health",
        "date": "2024-12-01",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/f/f4/Pharmacy_shelves.jpg",
    },
)
