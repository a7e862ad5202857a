# width limits

DEFAULT_WIDTH = 80
MIN_WIDTH = 20
MIN_MESSAGE_BUDGET = 10

# text composition

ELLIPSIS = '...'
SEP_FIELD = ' '
SEP_REF = ', '
REF_HEAD = 'HEAD'
SHORT_HASH_LEN = 7

DETAIL_INDENT = '  '

# placeholders printed by the command line front-end

NO_COMMITS_MSG = 'No commits to display'
NO_BRANCHES_MSG = 'No branches'

# configuration file names

CONFIG_DEFAULTS_NAME = 'config_commitgraph.yml'
CONFIG_LOGGING_NAME = 'config_logging.yml'
ENV_CONFIG_PREFIX = 'COMMITGRAPH_'
ENV_LOG_CFG = 'COMMITGRAPH_LOG_CFG'
