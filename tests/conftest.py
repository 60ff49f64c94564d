import os

import pytest

from uddf2py import config as config_module

TEST_DATA_DIR = os.path.join(os.path.dirname(__file__), 'test_data')


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer UDDF_* overrides out of the tests."""
    for var in ('UDDF_ENV', 'UDDF_DEFAULT_UNIT', 'UDDF_LABEL_REFERENCES', 'UDDF_LOG_LEVEL'):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def testing_config():
    """Configuration used by tests that pass it explicitly."""
    return config_module.TestingConfig()


@pytest.fixture
def load_test_xml():
    """Read a UDDF document from tests/test_data."""
    def _load(filename):
        with open(os.path.join(TEST_DATA_DIR, filename), encoding='utf-8') as f:
            return f.read()

    return _load


@pytest.fixture
def single_dive_tree():
    """A parsed tree where the XML held one repetition group with one dive."""
    return {
        'uddf': {
            'version': '3.2.1',
            'profiledata': {
                'repetitiongroup': {
                    'id': 'rg1',
                    'dive': {
                        'id': 'dive1',
                        'samples': {
                            'waypoint': {'depth': '10', 'divetime': '0'},
                        },
                    },
                },
            },
        },
    }


@pytest.fixture
def multi_dive_tree():
    """A parsed tree with two repetition groups, the first holding two dives."""
    return {
        'uddf': {
            'profiledata': {
                'repetitiongroup': [
                    {
                        'id': 'rg1',
                        'dive': [
                            {'id': 'a', 'informationafterdive': {'greatestdepth': '12'}},
                            {'id': 'b', 'informationafterdive': {'greatestdepth': '18'}},
                        ],
                    },
                    {
                        'id': 'rg2',
                        'dive': {'id': 'c', 'informationafterdive': {'greatestdepth': '7'}},
                    },
                ],
            },
        },
    }
