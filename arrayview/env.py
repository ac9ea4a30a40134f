import os

DEBUG = int(os.getenv("DEBUG", "0"))

assert DEBUG >= 0, f"invalid environ DEBUG={DEBUG}"
