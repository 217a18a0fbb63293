import json

import pytest


def node(group, artifact, version, scope='compile', children=None, optional='false'):
    """Build a node the way ``mvn dependency:tree -DoutputType=json`` writes it."""
    return {
        'groupId': group,
        'artifactId': artifact,
        'version': version,
        'type': 'jar',
        'scope': scope,
        'classifier': '',
        'optional': optional,
        'children': children or [],
    }


@pytest.fixture
def sample_tree():
    return node(
        'com.acme', 'app', '1.0.0', scope='', children=[
            node(
                'com.lib', 'foo', '1.0', children=[
                    node('org.slf4j', 'slf4j-api', '2.0.9'),
                ],
            ),
            node('com.acme.sub', 'bar', '2.0'),
            node('com.lib', 'foo', '1.0', scope='test'),
            node('junit', 'junit', '4.13.2', scope='test'),
            node('org.slf4j', 'slf4j-api', '2.0.9', scope='runtime'),
        ],
    )


@pytest.fixture
def write_tree(tmp_path):
    def _write(tree, name='tree.json'):
        path = tmp_path / name
        path.write_text(json.dumps(tree), encoding='utf-8')
        return path
    return _write


@pytest.fixture
def make_node():
    return node
