# routes package
# API routers

from .api_appinfo import router as api_appinfo_router
from .library import router as library_router
