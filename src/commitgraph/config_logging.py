import logging
import logging.config
import os

import yaml

from .constants import CONFIG_LOGGING_NAME, ENV_LOG_CFG


def setup_logging(cfg_path=CONFIG_LOGGING_NAME, cfg_level=None, env_key=ENV_LOG_CFG):
    '''configure logging for the commitgraph package

    The configuration is read from a yaml ``dictConfig`` document. A path set
    in the `COMMITGRAPH_LOG_CFG` environment variable takes precedence over
    ``cfg_path``.

    Parameters
    ----------
    cfg_path : str, optional
        yaml file, relative to the package directory, holding the logging
        configuration. (the default is 'config_logging.yml')
    cfg_level : int, optional
        when set, overrides the level of the ``commitgraph`` logger and its
        handlers after the file is applied. (the default is None, which keeps
        the levels of the file, or logging.WARNING when no file is found)
    env_key : str, optional
        environment variable which may name another logging config file. (the
        default is 'COMMITGRAPH_LOG_CFG')
    '''
    path = os.path.join(os.path.dirname(__file__), cfg_path)
    value = os.getenv(env_key, None)
    if value:
        path = value
    if os.path.exists(path):
        with open(path, 'rt') as f:
            config = yaml.safe_load(f.read())
        logging.config.dictConfig(config)
        if cfg_level is not None:
            pkg_logger = logging.getLogger('commitgraph')
            pkg_logger.setLevel(cfg_level)
            for handler in pkg_logger.handlers:
                handler.setLevel(cfg_level)
    else:
        logging.basicConfig(level=cfg_level if cfg_level is not None else logging.WARNING)
