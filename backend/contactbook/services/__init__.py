# Services package init
"""
Contact Book Backend — Services Layer
=======================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
Why:   Routes handle HTTP; services validate input and own the SQL.

Service Inventory:
    - AuthService:    sign-up (validate → hash → insert) and sign-in (lookup → verify)
    - ContactService: contact CRUD with an allow-listed partial update
    - validation:     email and password rules shared by AuthService
"""
