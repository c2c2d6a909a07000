# importing the modules registers their operators
from . import arithmetic, reducers  # noqa: F401
