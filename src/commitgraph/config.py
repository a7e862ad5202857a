'''
Configuration handling adapted from the Dask project
https://github.com/dask/dask

From file: dask/config.py

Dask License
-------------------------------------------------------------------------------
Copyright (c) 2014-2018, Anaconda, Inc. and contributors
All rights reserved.

Redistribution and use in source and binary forms, with or without modification,
are permitted provided that the following conditions are met:

Redistributions of source code must retain the above copyright notice,
this list of conditions and the following disclaimer.

Redistributions in binary form must reproduce the above copyright notice,
this list of conditions and the following disclaimer in the documentation
and/or other materials provided with the distribution.

Neither the name of Anaconda nor the names of any contributors may be used to
endorse or promote products derived from this software without specific prior
written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT OWNER OR CONTRIBUTORS BE
LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF
THE POSSIBILITY OF SUCH DAMAGE.
-------------------------------------------------------------------------------

Values are nested dictionaries. Defaults ship with the package in
``config_commitgraph.yml``; users may layer yaml files and
``COMMITGRAPH_*`` environment variables on top of them (see :func:`refresh`).
'''
import ast
import os
import threading
from functools import lru_cache

import yaml

from .constants import CONFIG_DEFAULTS_NAME, ENV_CONFIG_PREFIX

no_default = '__no_default__'
global_config = config = {}
config_lock = threading.Lock()
defaults = []

paths = [
    os.getenv('COMMITGRAPH_CONFIG', os.path.join(os.path.expanduser('~'), '.config', 'commitgraph')),
]


def update(old, new, priority='new'):
    ''' Merge ``new`` into the nested dictionary ``old`` in place.

    With ``priority='old'`` existing leaf values in ``old`` are kept.

    >>> a = {'render': {'width': 80, 'style': 'ascii'}}
    >>> update(a, {'render': {'width': 120}})  # doctest: +SKIP
    {'render': {'width': 120, 'style': 'ascii'}}
    '''
    for k, v in new.items():
        if isinstance(v, dict):
            if not isinstance(old.get(k), dict):
                old[k] = {}
            update(old[k], v, priority=priority)
        elif priority == 'new' or k not in old:
            old[k] = v
    return old


def merge(*dicts):
    ''' Merge nested dictionaries, later ones winning.
    '''
    result = {}
    for d in dicts:
        update(result, d)
    return result


def collect_yaml(paths=paths):
    ''' Load every yaml file found at ``paths``.

    Directories are searched (non-recursively) for ``.yaml`` / ``.yml`` files
    in sorted order; unreadable files are skipped.
    '''
    file_paths = []
    for path in paths:
        if not os.path.exists(path):
            continue
        if os.path.isdir(path):
            try:
                file_paths.extend(sorted(
                    os.path.join(path, p) for p in os.listdir(path)
                    if os.path.splitext(p)[1].lower() in ('.yaml', '.yml')))
            except OSError:
                pass
        else:
            file_paths.append(path)

    configs = []
    for path in file_paths:
        try:
            with open(path) as f:
                configs.append(yaml.safe_load(f.read()) or {})
        except OSError:
            pass
    return configs


def collect_env(env=None):
    ''' Collect configuration from ``COMMITGRAPH_*`` environment variables

    Double underscores nest keys and values are parsed as yaml scalars::

        COMMITGRAPH_RENDER__WIDTH=120  ->  {'render': {'width': 120}}
        COMMITGRAPH_RENDER__STYLE=ascii  ->  {'render': {'style': 'ascii'}}
    '''
    if env is None:
        env = os.environ
    result = {}
    for name, value in env.items():
        if not name.startswith(ENV_CONFIG_PREFIX) or name == 'COMMITGRAPH_CONFIG':
            continue
        if name == 'COMMITGRAPH_LOG_CFG':
            continue
        keys = name[len(ENV_CONFIG_PREFIX):].lower().split('__')
        try:
            parsed = yaml.safe_load(value)
        except yaml.YAMLError:
            try:
                parsed = ast.literal_eval(value)
            except (SyntaxError, ValueError):
                parsed = value
        d = result
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = parsed
    return result


class conf_set(object):
    ''' Temporarily set configuration values within a context manager

    >>> from commitgraph import config
    >>> with config.conf_set({'render.width': 120}):
    ...     pass
    '''
    def __init__(self, arg=None, config=config, lock=config_lock, **kwargs):
        get.cache_clear()
        if arg and not kwargs:
            kwargs = arg

        with lock:
            self.config = config
            self.old = {}
            for key, value in kwargs.items():
                self._assign(key.split('.'), value, config, old=self.old)

    def __enter__(self):
        get.cache_clear()
        return self.config

    def __exit__(self, type, value, traceback):
        get.cache_clear()
        for keys, old_value in self.old.items():
            if old_value == '--delete--':
                d = self.config
                try:
                    for key in keys[:-1]:
                        d = d[key]
                    del d[keys[-1]]
                except KeyError:
                    pass
            else:
                self._assign(list(keys), old_value, self.config)
        get.cache_clear()

    @classmethod
    def _assign(cls, keys, value, d, old=None, path=()):
        ''' Assign ``value`` at the nested ``keys`` path of ``d``.

        When ``old`` is given, the replaced value (or ``'--delete--'`` for a
        key that did not exist) is recorded under the full key path.
        '''
        key = keys[0]
        if len(keys) == 1:
            if old is not None:
                old[(*path, key)] = d[key] if key in d else '--delete--'
            d[key] = value
            return
        if key not in d:
            d[key] = {}
            if old is not None:
                old[(*path, key)] = '--delete--'
            old = None
        cls._assign(keys[1:], value, d[key], old=old, path=(*path, key))


def collect(paths=paths, env=None):
    ''' Configuration from yaml files at ``paths`` overlaid with the environment.
    '''
    configs = collect_yaml(paths=paths)
    configs.append(collect_env(env=env))
    return merge(*configs)


def refresh(config=config, defaults=defaults, **kwargs):
    ''' Rebuild configuration from defaults, yaml files and environment variables

    Mutates the global ``commitgraph.config.config`` unless ``config`` is
    passed in. Keyword arguments are forwarded to :func:`collect`.
    '''
    get.cache_clear()
    config.clear()
    for d in defaults:
        update(config, d, priority='new')
    update(config, collect(**kwargs))
    get.cache_clear()


def _lookup(key, default, config):
    result = config
    for k in key.split('.'):
        try:
            result = result[k]
        except (TypeError, IndexError, KeyError):
            if default is not no_default:
                return default
            raise
    return result


@lru_cache(maxsize=128)
def _get_global(key, default):
    return _lookup(key, default, global_config)


def get(key, default=no_default, config=config):
    ''' Get elements from configuration, ``'.'`` separating nested keys

    Lookups on the global configuration are cached until the next
    :class:`conf_set`, :func:`refresh` or :func:`update_defaults`.

    >>> from commitgraph import config
    >>> config.get('render.width')  # doctest: +SKIP
    80
    >>> config.get('render.nope', default=123)  # doctest: +SKIP
    123
    '''
    if config is not global_config:
        return _lookup(key, default, config)
    try:
        hash(default)
    except TypeError:
        return _lookup(key, default, config)
    return _get_global(key, default)


get.cache_clear = _get_global.cache_clear


def update_defaults(new, config=config, defaults=defaults):
    ''' Register a set of defaults and fold them into the configuration

    Existing values win over the new defaults; :func:`refresh` replays every
    registered set.
    '''
    get.cache_clear()
    defaults.append(new)
    update(config, new, priority='old')
    get.cache_clear()


def to_yaml(config=config) -> str:
    return yaml.safe_dump(config, default_flow_style=False, sort_keys=True)


fn = os.path.join(os.path.dirname(__file__), CONFIG_DEFAULTS_NAME)
with open(fn) as f:
    _defaults = yaml.safe_load(f)

update_defaults(_defaults)
update(config, collect())
