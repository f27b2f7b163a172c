import os

BASE_PATH = os.path.join(os.path.dirname(__file__), "..", "static")

def load_page(filename: str) -> str:
    path = os.path.join(BASE_PATH, filename)
    with open(path, encoding="utf-8") as f:
        return f.read()
