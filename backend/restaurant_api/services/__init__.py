# Services package init
"""
Restaurant API — Services Layer
================================

What:  Business logic between the RPC procedures and the database.
How:   Stateless classes with a module-level singleton each. Every method
       takes the request's AsyncSession, performs one persistence
       operation and returns response schemas built by conversions.py.

Service Inventory:
    - MenuService:        menu catalog CRUD
    - OrderService:       order placement with menu item existence check
    - ReservationService: reservations and status updates
    - TestimonialService: reviews CRUD and minimum-rating filter

Database failures are logged by @logs_persistence_errors (persistence.py)
and re-raised unchanged.
"""
