from .parser import ArgParser_i
