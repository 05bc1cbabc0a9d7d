from bitbench.utils.helpers import format_ns, format_ratio

__all__ = ['format_ns', 'format_ratio']
