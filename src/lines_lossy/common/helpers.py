KB = 1024

LF = b'\n'
CR = b'\r'


def is_positive(n) -> bool:
    return n > 0
