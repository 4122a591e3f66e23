import logging
import sys

from ruamel.yaml import YAML

yaml = YAML()

log = logging.getLogger(__name__)


def load_manifest(pathn):
    try:
        with open(pathn, "r") as f:
            return yaml.load(f)
    except FileNotFoundError:
        log.error("File can not be found: %s", pathn)
        sys.exit(2)


# Multi-document stream; documents without contents are dropped
def load_manifests(pathn):
    try:
        with open(pathn, "r") as f:
            return [doc for doc in yaml.load_all(f) if doc is not None]
    except FileNotFoundError:
        log.error("File can not be found: %s", pathn)
        sys.exit(2)


def dump_manifest(pathn, manifest):
    with open(pathn, "w") as f:
        yaml.dump(manifest, f)
    return
