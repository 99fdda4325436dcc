"""Global pytest configuration."""

import os

# Never reach the real language service from tests
os.environ["XAI_API_KEY"] = ""
