"""
Export backends. Each module exposes a pure `render(config) -> str`.
"""
