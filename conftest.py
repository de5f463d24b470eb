"""Global pytest configuration."""

import os

# Never reach the real remote model from tests
os.environ["HF_API_TOKEN"] = ""
