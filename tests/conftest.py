import os

# keep engine logging off the pytest console
os.environ.setdefault("MARVIN_ENGINE_DISABLE_CONSOLE", "1")
