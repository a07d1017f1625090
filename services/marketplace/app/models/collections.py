"""Firestore collection names used by the marketplace service."""

COLLECTION_PROFESSIONALS = "professionals"
COLLECTION_QUOTES = "quotes"
COLLECTION_BANNERS = "banners"
COLLECTION_AD_CLICKS = "ads_clicks"
COLLECTION_ADMIN_USERS = "admin_users"
