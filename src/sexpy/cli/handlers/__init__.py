from .compile import handle_compile

__all__ = ["handle_compile"]
