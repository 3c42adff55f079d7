from swapmath.config import settings

LIB_CACHE_SIZE = settings.library.cache_size
