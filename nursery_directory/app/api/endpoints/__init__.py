"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one collection
(nurseries, offers, categories, sponsors, settings).  The routers are
aggregated in ``router.py`` at the package level and mounted by the
application under ``/api``.
"""
