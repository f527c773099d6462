# Routes package init
"""
Contact Book Backend — API Routes Package
===========================================

Route Inventory:
    - auth.py:      POST /signup, POST /signin
    - contacts.py:  GET/POST /contacts, GET/PUT/DELETE /contacts/{id}
    - health.py:    GET / (banner), GET /health

Design Principle:
    Routes are THIN: pull data out of the request, call a service, choose
    the status code. Errors are raised by services and formatted by the
    global exception handlers in main.py.
"""
