"""
Dash front end: layout, renderer and callback registration.
"""
