"""Helper functions for building test trees."""


def write(path, text="data"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def read(path):
    return path.read_text(encoding="utf-8")
