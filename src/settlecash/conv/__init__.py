from .conv import to_dec_strict, to_int_lenient

__all__ = ["to_dec_strict", "to_int_lenient"]
