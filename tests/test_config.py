import pytest


def test_defaults_loaded():
    from commitgraph import config
    assert config.get('render.width') == 80
    assert config.get('render.style') == 'unicode'
    assert config.get('render.color') is False
    assert config.get('theme.palette')[0] == '#00D9A5'


def test_get_missing_key():
    from commitgraph import config
    assert config.get('render.nope', 123) == 123
    assert config.get('render.nope', default=[1]) == [1]
    with pytest.raises(KeyError):
        config.get('render.nope')


def test_update_nested():
    from commitgraph import config
    a = {'render': {'width': 80, 'style': 'ascii'}, 'x': 1}
    config.update(a, {'render': {'width': 120}, 'y': 2})
    assert a == {'render': {'width': 120, 'style': 'ascii'}, 'x': 1, 'y': 2}


def test_update_priority_old():
    from commitgraph import config
    a = {'render': {'width': 80}}
    config.update(a, {'render': {'width': 120, 'style': 'ascii'}}, priority='old')
    assert a == {'render': {'width': 80, 'style': 'ascii'}}


def test_merge_later_wins():
    from commitgraph import config
    merged = config.merge({'a': {'b': 1, 'c': 2}}, {'a': {'b': 3}}, {'d': 4})
    assert merged == {'a': {'b': 3, 'c': 2}, 'd': 4}


def test_conf_set_restores_values():
    from commitgraph import config
    with config.conf_set({'render.width': 120, 'brand.new.key': 'yes'}):
        assert config.get('render.width') == 120
        assert config.get('brand.new.key') == 'yes'
    assert config.get('render.width') == 80
    assert config.get('brand', None) is None


def test_conf_set_kwargs_on_local_config():
    from commitgraph import config
    local = {'a': {'b': 1}}
    with config.conf_set(config=local, **{'a.b': 2}):
        assert config.get('a.b', config=local) == 2
    assert local == {'a': {'b': 1}}


def test_collect_env():
    from commitgraph import config
    env = {
        'COMMITGRAPH_RENDER__WIDTH': '120',
        'COMMITGRAPH_RENDER__STYLE': 'ascii',
        'COMMITGRAPH_RENDER__COLOR': 'true',
        'COMMITGRAPH_THEME__PALETTE': "['red', 'green']",
        'COMMITGRAPH_LOG_CFG': '/tmp/logging.yml',
        'HOME': '/root',
    }
    assert config.collect_env(env) == {
        'render': {'width': 120, 'style': 'ascii', 'color': True},
        'theme': {'palette': ['red', 'green']},
    }


def test_collect_yaml(tmp_path):
    from commitgraph import config
    (tmp_path / 'a.yml').write_text('render:\n  width: 100\n')
    (tmp_path / 'b.yaml').write_text('render:\n  style: compact\n')
    (tmp_path / 'ignored.txt').write_text('render: nope\n')
    configs = config.collect_yaml(paths=[str(tmp_path), str(tmp_path / 'missing')])
    assert configs == [{'render': {'width': 100}}, {'render': {'style': 'compact'}}]


def test_refresh_layers_defaults_files_and_env(tmp_path):
    from commitgraph import config
    (tmp_path / 'user.yml').write_text('render:\n  width: 100\n  style: ascii\n')
    local = {'stale': True}
    config.refresh(config=local,
                   defaults=[{'render': {'width': 80, 'style': 'unicode', 'color': False}}],
                   paths=[str(tmp_path)],
                   env={'COMMITGRAPH_RENDER__WIDTH': '132'})
    assert local == {'render': {'width': 132, 'style': 'ascii', 'color': False}}


def test_update_defaults_keeps_existing_values():
    from commitgraph import config
    local = {'render': {'width': 90}}
    registered = []
    config.update_defaults({'render': {'width': 80, 'show_meta': True}},
                           config=local, defaults=registered)
    assert local == {'render': {'width': 90, 'show_meta': True}}
    assert registered == [{'render': {'width': 80, 'show_meta': True}}]


def test_to_yaml_round_trip():
    import yaml
    from commitgraph import config
    assert yaml.safe_load(config.to_yaml({'render': {'width': 80}})) == {'render': {'width': 80}}


def test_render_options_from_config():
    from commitgraph import config
    from commitgraph.graph import GraphStyle, RenderOptions
    with config.conf_set({'render.style': 'ascii', 'render.width': 50, 'render.show_meta': True}):
        opts = RenderOptions.from_config()
        assert opts.style is GraphStyle.ASCII
        assert opts.width == 50
        assert opts.show_meta is True
        assert opts.palette is None

        opts = RenderOptions.from_config(width=90, style=None, color=True)
        assert opts.style is GraphStyle.ASCII
        assert opts.width == 90
        assert opts.palette == tuple(config.get('theme.palette'))


def test_render_options_from_config_explicit_palette():
    from commitgraph.graph import RenderOptions
    opts = RenderOptions.from_config(palette=('red', 'blue'))
    assert opts.palette == ('red', 'blue')
    opts = RenderOptions.from_config(palette=('red', 'blue'), color=False)
    assert opts.palette is None


def test_setup_logging_from_file(tmp_path, monkeypatch):
    import logging
    from commitgraph.config_logging import setup_logging
    cfg = tmp_path / 'log.yml'
    cfg.write_text('version: 1\n'
                   'disable_existing_loggers: false\n'
                   'loggers:\n'
                   '  commitgraph:\n'
                   '    level: ERROR\n')
    monkeypatch.setenv('COMMITGRAPH_LOG_CFG', str(cfg))
    setup_logging()
    assert logging.getLogger('commitgraph').level == logging.ERROR
    setup_logging(cfg_level=logging.DEBUG)
    assert logging.getLogger('commitgraph').level == logging.DEBUG


def test_setup_logging_packaged_config(monkeypatch):
    import logging
    from commitgraph.config_logging import setup_logging
    monkeypatch.delenv('COMMITGRAPH_LOG_CFG', raising=False)
    setup_logging()
    pkg_logger = logging.getLogger('commitgraph')
    assert pkg_logger.level == logging.WARNING
    assert pkg_logger.propagate is False


def test_module_carries_dask_license_notice():
    from commitgraph import config
    doc = config.__doc__
    assert 'Copyright (c) 2014-2018, Anaconda, Inc. and contributors' in doc
    assert 'All rights reserved.' in doc
    assert 'Neither the name of Anaconda nor the names of any contributors' in doc
    assert 'THE POSSIBILITY OF SUCH DAMAGE.' in doc
