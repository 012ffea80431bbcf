from rucpy.api.main import app

__all__ = ["app"]
