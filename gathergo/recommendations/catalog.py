"""Default event catalog served when no better recommendations are available."""

from __future__ import annotations

from .models import EventRecommendation

_CATALOG = (
    {
        "id": "evt-1",
        "title": "Free Jazz Picnic",
        "location": "Central Park",
        "time": "Saturday, 3:00 PM",
        "price": "$15/person",
        "description": (
            "Live jazz band with picnic setup and food trucks. "
            "Perfect for a relaxing afternoon."
        ),
        "image_url": "https://images.unsplash.com/photo-1511192336575-5a79af67a629?w=800",
        "match_score": 95,
        "tags": ("Picnic", "Concert", "Music"),
        "emoji": "\U0001f3b6",
    },
    {
        "id": "evt-2",
        "title": "Rooftop Dinner",
        "location": "Downtown Skybar",
        "time": "Friday, 7:00 PM",
        "price": "$45/person",
        "description": (
            "Italian cuisine with breathtaking city views. "
            "Great for a fancy night out."
        ),
        "image_url": "https://images.unsplash.com/photo-1517248135467-4c7edcad34c4?w=800",
        "match_score": 88,
        "tags": ("Dinner", "Food & Drinks", "View"),
        "emoji": "\U0001f37d️",
    },
    {
        "id": "evt-3",
        "title": "Coffee & Catch Up",
        "location": "The Brew House",
        "time": "Sunday, 10:00 AM",
        "price": "$8/person",
        "description": "Cozy cafe with board games and artisan coffee blends.",
        "image_url": "https://images.unsplash.com/photo-1509042239860-f550ce710b93?w=800",
        "match_score": 85,
        "tags": ("Coffee", "Gaming", "Relax"),
        "emoji": "☕",
    },
    {
        "id": "evt-4",
        "title": "Movie Marathon",
        "location": "Cinema Plaza",
        "time": "Saturday, 7:30 PM",
        "price": "$12/person",
        "description": "Back-to-back screenings of classic films with premium seating.",
        "image_url": "https://images.unsplash.com/photo-1489599849927-2ee91cede3ba?w=800",
        "match_score": 82,
        "tags": ("Movie", "Entertainment", "Popcorn"),
        "emoji": "\U0001f3ac",
    },
    {
        "id": "evt-5",
        "title": "Modern Art Gallery Tour",
        "location": "MoMA",
        "time": "Sunday, 11:00 AM",
        "price": "$25/person",
        "description": "Guided tour of the new exhibition with expert commentary.",
        "image_url": "https://images.unsplash.com/photo-1561214115-f2f134cc4912?w=800",
        "match_score": 80,
        "tags": ("Museums", "Arts", "Culture"),
        "emoji": "\U0001f3db️",
    },
    {
        "id": "evt-6",
        "title": "Sunset Beach Yoga",
        "location": "Ocean Beach",
        "time": "Saturday, 6:00 PM",
        "price": "$20/person",
        "description": "Relaxing yoga session by the waves followed by meditation.",
        "image_url": "https://images.unsplash.com/photo-1506126613408-eca07ce68773?w=800",
        "match_score": 78,
        "tags": ("Wellness", "Beach", "Sports"),
        "emoji": "\U0001f9d8",
    },
    {
        "id": "evt-7",
        "title": "Hiking Adventure",
        "location": "Bear Mountain",
        "time": "Sunday, 8:00 AM",
        "price": "Free",
        "description": "Moderate trail with scenic overlooks. Bring your own water!",
        "image_url": "https://images.unsplash.com/photo-1551632811-561732d1e306?w=800",
        "match_score": 75,
        "tags": ("Hiking", "Sports", "Nature"),
        "emoji": "⛰️",
    },
    {
        "id": "evt-8",
        "title": "Shopping Spree",
        "location": "SoHo District",
        "time": "Saturday, 1:00 PM",
        "price": "Free entry",
        "description": (
            "Explore trendy boutiques and pop-up shops in the heart of the city."
        ),
        "image_url": "https://images.unsplash.com/photo-1483985988355-763728e1935b?w=800",
        "match_score": 72,
        "tags": ("Shopping", "Lifestyle", "Fashion"),
        "emoji": "\U0001f6cd️",
    },
    {
        "id": "evt-9",
        "title": "Gaming Tournament",
        "location": "Arcade Bar",
        "time": "Friday, 9:00 PM",
        "price": "$10 entry",
        "description": "Retro arcade games and e-sports tournament with prizes.",
        "image_url": "https://images.unsplash.com/photo-1511512578047-dfb367046420?w=800",
        "match_score": 70,
        "tags": ("Gaming", "Entertainment", "Nightlife"),
        "emoji": "\U0001f3ae",
    },
    {
        "id": "evt-10",
        "title": "Book Club Meetup",
        "location": "City Library",
        "time": "Sunday, 2:00 PM",
        "price": "Free",
        "description": "Discussing the latest bestseller with fellow book lovers.",
        "image_url": "https://images.unsplash.com/photo-1495446815901-a7297e633e8d?w=800",
        "match_score": 68,
        "tags": ("Books", "Culture", "Quiet"),
        "emoji": "\U0001f4da",
    },
)


def default_recommendations() -> list[EventRecommendation]:
    """Return a fresh list of the default catalog events."""
    return [EventRecommendation(**entry) for entry in _CATALOG]
