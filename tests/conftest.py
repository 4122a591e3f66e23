import pytest
from ruamel.yaml import YAML

ANNOTATIONS = """\
annotations:
  operators.operatorframework.io.bundle.mediatype.v1: registry+v1
  operators.operatorframework.io.bundle.manifests.v1: manifests/
  operators.operatorframework.io.bundle.metadata.v1: metadata/
  operators.operatorframework.io.bundle.package.v1: external-secrets-operator
  operators.operatorframework.io.bundle.channels.v1: stable
"""

CLUSTERSERVICEVERSION = """\
apiVersion: operators.coreos.com/v1alpha1
kind: ClusterServiceVersion
metadata:
  name: external-secrets.v0.0.0
  annotations:
    capabilities: Basic Install
    containerImage: placeholder
spec:
  displayName: External Secrets Operator
  customresourcedefinitions:
    owned:
    - name: stale.external-secrets.io
      kind: Stale
      version: v1
  install:
    strategy: deployment
    spec:
      clusterPermissions:
      - serviceAccountName: external-secrets
        rules: []
      deployments: []
  installModes:
  - type: AllNamespaces
    supported: true
"""


def load_yaml(pathn):
    with open(pathn) as f:
        return YAML(typ="safe").load(f)


def load_yaml_all(text):
    return list(YAML().load_all(text))


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "annotations.yaml").write_text(ANNOTATIONS)
    (tmp_path / "clusterserviceversion.yaml").write_text(CLUSTERSERVICEVERSION)
    monkeypatch.chdir(tmp_path)
    return tmp_path
