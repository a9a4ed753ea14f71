from app.models.mapping import UrlMapping

__all__ = ["UrlMapping"]
