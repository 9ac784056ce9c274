"""Routing — path templates, routes, and mountable routers.

Routes and routers are wired up during setup and only read while
requests are being served.
"""
