from .difference import delta_e_76, delta_e_oklab, delta_e_2000

__all__ = ["delta_e_76", "delta_e_oklab", "delta_e_2000"]
