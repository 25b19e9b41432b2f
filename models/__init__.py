# backend/models/__init__.py
# Re-exports the table models so `import models` registers them with SQLModel.
from .contact_message import *
from .visitor import *
