"""Shared fixtures for zk4lw tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

from zk4lw.config.models import Zk4lwConfig


SAMPLE_CONFIG: Dict[str, Any] = {
    "zk4lw": {"name": "zk4lw", "version": "0.1.0"},
    "defaults": {"port": 2181, "timeout": 10.0},
    "servers": {
        "zk1": {"host": "zk1.local", "description": "First member"},
        "zk2": {"host": "zk2.local", "port": 2182, "timeout": 2.5},
    },
}

# 3.4.14 leader, 22 keys, one of them (zk_fsync_threshold_exceed_count) unmapped.
MNTR_3_4_LEADER = (
    "zk_version\t3.4.14-4c25d480e66aadd371de8bd2fd8da255ac140bcf, built on 03/06/2019 16:18 GMT\n"
    "zk_avg_latency\t0\n"
    "zk_max_latency\t12\n"
    "zk_min_latency\t0\n"
    "zk_packets_received\t13\n"
    "zk_packets_sent\t12\n"
    "zk_num_alive_connections\t1\n"
    "zk_outstanding_requests\t0\n"
    "zk_server_state\tleader\n"
    "zk_znode_count\t4\n"
    "zk_watch_count\t0\n"
    "zk_ephemerals_count\t0\n"
    "zk_approximate_data_size\t27\n"
    "zk_open_file_descriptor_count\t34\n"
    "zk_max_file_descriptor_count\t1048576\n"
    "zk_fsync_threshold_exceed_count\t0\n"
    "zk_followers\t2\n"
    "zk_synced_followers\t2\n"
    "zk_pending_syncs\t0\n"
    "zk_last_proposal_size\t-1\n"
    "zk_max_proposal_size\t-1\n"
    "zk_min_proposal_size\t-1\n"
)

# 3.5.8 leader with only keys the client maps.
MNTR_3_5_LEADER = (
    "zk_version\t3.5.8-f439ca583e70862c3068a1f2a7d4d068eec33315, built on 05/04/2020 15:07 GMT\n"
    "zk_avg_latency\t0.0\n"
    "zk_max_latency\t0\n"
    "zk_min_latency\t0\n"
    "zk_packets_received\t5\n"
    "zk_packets_sent\t4\n"
    "zk_num_alive_connections\t1\n"
    "zk_outstanding_requests\t0\n"
    "zk_server_state\tleader\n"
    "zk_znode_count\t5\n"
    "zk_watch_count\t0\n"
    "zk_ephemerals_count\t0\n"
    "zk_approximate_data_size\t44\n"
    "zk_open_file_descriptor_count\t67\n"
    "zk_max_file_descriptor_count\t1048576\n"
    "zk_followers\t2\n"
    "zk_synced_followers\t2\n"
    "zk_pending_syncs\t0\n"
    "zk_last_proposal_size\t36\n"
    "zk_max_proposal_size\t36\n"
    "zk_min_proposal_size\t32\n"
)

# 3.5.8 follower: no leader-only keys.
MNTR_3_5_FOLLOWER = (
    "zk_version\t3.5.8-f439ca583e70862c3068a1f2a7d4d068eec33315, built on 05/04/2020 15:07 GMT\n"
    "zk_avg_latency\t1.5\n"
    "zk_max_latency\t9\n"
    "zk_min_latency\t0\n"
    "zk_packets_received\t120\n"
    "zk_packets_sent\t119\n"
    "zk_num_alive_connections\t3\n"
    "zk_outstanding_requests\t0\n"
    "zk_server_state\tfollower\n"
    "zk_znode_count\t5\n"
    "zk_watch_count\t2\n"
    "zk_ephemerals_count\t1\n"
    "zk_approximate_data_size\t44\n"
)

CONF_3_5 = (
    "clientPort=2181\n"
    "secureClientPort=-1\n"
    "dataDir=/data/version-2\n"
    "dataDirSize=67108880\n"
    "dataLogDir=/datalog/version-2\n"
    "dataLogSize=424\n"
    "tickTime=2000\n"
    "maxClientCnxns=60\n"
    "minSessionTimeout=4000\n"
    "maxSessionTimeout=40000\n"
    "serverId=1\n"
    "initLimit=5\n"
    "syncLimit=2\n"
    "electionAlg=3\n"
    "electionPort=3888\n"
    "quorumPort=2888\n"
    "peerType=0\n"
    "membership: \n"
    "server.1=zoo1:2888:3888:participant;0.0.0.0:2181\n"
    "server.2=zoo2:2888:3888:participant;0.0.0.0:2181\n"
    "version=0\n"
)

ENVI_3_5 = (
    "Environment:\n"
    "zookeeper.version=3.5.8-f439ca583e70862c3068a1f2a7d4d068eec33315, built on 05/04/2020 15:07 GMT\n"
    "host.name=zoo1\n"
    "java.version=11.0.7\n"
    "java.vendor=Oracle Corporation\n"
    "java.home=/usr/local/openjdk-11\n"
    "os.name=Linux\n"
    "os.arch=amd64\n"
    "user.name=zookeeper\n"
    "user.dir=/apache-zookeeper-3.5.8-bin\n"
)


@pytest.fixture()
def sample_config() -> Zk4lwConfig:
    """Return a parsed Zk4lwConfig from sample data."""
    return Zk4lwConfig(**SAMPLE_CONFIG)


@pytest.fixture()
def sample_config_dict() -> Dict[str, Any]:
    """Return raw sample config dict."""
    return dict(SAMPLE_CONFIG)


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    """Write sample config to a temp .zk4lw.yaml and return the path."""
    path = tmp_path / ".zk4lw.yaml"
    with path.open("w") as fh:
        yaml.dump(SAMPLE_CONFIG, fh)
    return path


@pytest.fixture()
def mntr_3_4_leader() -> str:
    return MNTR_3_4_LEADER


@pytest.fixture()
def mntr_3_5_leader() -> str:
    return MNTR_3_5_LEADER


@pytest.fixture()
def mntr_3_5_follower() -> str:
    return MNTR_3_5_FOLLOWER


@pytest.fixture()
def conf_3_5() -> str:
    return CONF_3_5


@pytest.fixture()
def envi_3_5() -> str:
    return ENVI_3_5
