# Routes package init
"""
Restaurant API — HTTP Routes Package
=====================================

Route Inventory:
    - rpc.py:     GET  {RPC_PREFIX}              (procedure listing)
                  GET  {RPC_PREFIX}/{procedure}  (queries)
                  POST {RPC_PREFIX}/{procedure}  (mutations)
    - health.py:  GET  /health                   (service health check)

Routes stay thin: decode the HTTP request, hand off to the procedure
router or the database, and wrap the result.
"""
