# Collection strategies
COLLECT_FROM_SLOWLOG = "slowlog"
COLLECT_FROM_PERFSCHEMA = "perfschema"
COLLECT_FROM_CHOICES = (COLLECT_FROM_SLOWLOG, COLLECT_FROM_PERFSCHEMA)

# Built-in defaults, used until a server probe refreshes them
DEFAULT_COLLECT_FROM = COLLECT_FROM_SLOWLOG
DEFAULT_INTERVAL = 60  # 1 minute
DEFAULT_LONG_QUERY_TIME = 0.001  # 1ms
DEFAULT_MAX_SLOW_LOG_SIZE = 1024 * 1024 * 1024  # 1 GiB
DEFAULT_REMOVE_OLD_SLOW_LOGS = True
DEFAULT_EXAMPLE_QUERIES = True
# The following four are only honored by Percona Server
DEFAULT_SLOW_LOG_VERBOSITY = "full"
DEFAULT_RATE_LIMIT = 100  # 1 in 100 queries
DEFAULT_LOG_SLOW_ADMIN_STATEMENTS = True
DEFAULT_LOG_SLOW_SLAVE_STATEMENTS = True
DEFAULT_REPORT_LIMIT = 200

# Interval bounds (in seconds)
MIN_INTERVAL = 1
MAX_INTERVAL = 3600  # 1 hour
# ParseUint(val, 10, 32)
MAX_INTERVAL_LITERAL = 2**32 - 1

# Workers run for 90% of the interval, leaving room to report
WORKER_RUNTIME_NUMERATOR = 9
WORKER_RUNTIME_DENOMINATOR = 10

# Server statements
SLOW_QUERY_LOG_OFF = "SET GLOBAL slow_query_log=OFF"
SLOW_QUERY_LOG_ON = "SET GLOBAL slow_query_log=ON"
LOG_OUTPUT_FILE = "SET GLOBAL log_output='file'"  # as of MySQL 5.1.6
TIME_ZONE_UTC = "SET time_zone='+0:00'"

# Environment variables
DSN_ENV_VAR = "QAN_MYSQL_DSN"
