# Importing the modules registers the built-in sources
from . import serpapi_google  # noqa: F401
from . import demo_profiles  # noqa: F401
