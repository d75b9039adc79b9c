from .module import CODE, NAME, build_english, create_english

__all__ = ["CODE", "NAME", "build_english", "create_english"]
