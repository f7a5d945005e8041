"""Registry bootstrap, run once from the package __init__."""
from .api import set_registry
from .bootstrap import build_registry

set_registry(build_registry())
