from mockql.logging import ConsoleLoggerInterface
from mockql.constants import CONSOLE_LOG_LEVEL


console = ConsoleLoggerInterface('mockql', level=CONSOLE_LOG_LEVEL)
