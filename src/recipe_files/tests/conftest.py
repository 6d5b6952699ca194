import pytest
from unittest.mock import MagicMock

from ..config import FetcherSettings
from ..recipes import RecipeFileFetcher


MYSQL_RECIPE_YAML = """\
name: mysql-open-source-integration
description: MySQL Open Source Integration
repository: https://github.com/newrelic/nri-mysql
keywords:
  - Integration
  - MySQL
processMatch:
  - mysqld
installTargets:
  - type: host
    os: linux
    platform: ubuntu
    platformFamily: debian
    platformVersion: "20.04"
    kernelVersion: 5.4.0
    kernelArch: x86_64
inputVars:
  - name: NR_CLI_DB_USERNAME
    prompt: MySQL Username
    default: root
  - name: NR_CLI_DB_PASSWORD
    prompt: MySQL Password
    secret: true
  - name: NR_CLI_DB_PORT
    prompt: MySQL Port
    default: 3306
logMatch:
  - name: mysql
    file: /var/log/mysql/error.log
    attributes:
      logtype: mysql-error
  - name: mysqld
    file: /var/log/mysqld.log
    pattern: ERROR
    systemd: mysqld
validationNrql: "SELECT count(*) from MysqlSample where hostname like '{{.HOSTNAME}}%' FACET entityGuid SINCE 10 minutes ago"
install:
  version: "3"
  silent: true
  tasks:
    default:
      cmds:
        - task: setup
    setup:
      cmds:
        - |
          sudo mkdir -p /etc/newrelic-infra/integrations.d
      vars:
        retries: 3
"""


def create_mock_response(body: bytes = b"", status_code: int = 200) -> MagicMock:
    """Create a mock HTTP response carrying a body."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = body
    return response


@pytest.fixture
def recipe_yaml():
    return MYSQL_RECIPE_YAML


@pytest.fixture
def settings():
    return FetcherSettings(timeout=None, check_status=False)


@pytest.fixture
def mock_http_get():
    return MagicMock(return_value=create_mock_response(MYSQL_RECIPE_YAML.encode()))


@pytest.fixture
def mock_read_file():
    return MagicMock(return_value=MYSQL_RECIPE_YAML.encode())


@pytest.fixture
def fetcher(mock_http_get, mock_read_file, settings):
    return RecipeFileFetcher(
        http_get_func=mock_http_get,
        read_file_func=mock_read_file,
        settings=settings,
    )
