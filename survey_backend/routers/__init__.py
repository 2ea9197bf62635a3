# survey_backend/routers/__init__.py

from .responses import router as responses_router
from .distribution import router as distribution_router
