# RPC package init
"""
Restaurant API — RPC Layer
===========================

What:  A flat, named-procedure router in the style of tRPC.
How:   registry.py holds the generic ProcedureRouter (queries vs mutations,
       input validation through pydantic TypeAdapters); procedures.py
       registers one procedure per service operation.
Who:   routes/rpc.py exposes the router over HTTP.
"""
