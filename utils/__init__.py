from .config import CONFIG, load_config
from .datastructures import RawReceipt, Receipt, SecretStr
from .decorators import singleton
from .logger import Logger, str_num
from .timer import execution_time, measure_time
