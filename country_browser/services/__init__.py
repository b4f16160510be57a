"""
Service layer: fetching the country dataset and holding it for the session.
"""
