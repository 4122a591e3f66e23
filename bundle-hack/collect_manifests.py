import logging
import os
from dataclasses import dataclass, field

from manifests import dump_manifest

log = logging.getLogger(__name__)

# Not supported by operator-sdk bundles
ignored_kinds = ("NetworkPolicy", "Namespace")

rbac_kinds = ("Role", "RoleBinding", "ClusterRole", "ClusterRoleBinding")
deployment_kinds = ("Service", "ServiceAccount", "Deployment")

# Only RBAC objects of the controller itself end up in the CSV
controller_suffix = "-controller"

kind_map = {
    "Role": "role",
    "RoleBinding": "rolebinding",
    "ClusterRoleBinding": "clusterrolebinding",
    "Deployment": "deployment",
    "CustomResourceDefinition": "crd",
    "Service": "service",
    "ClusterRole": "clusterrole",
    "ServiceAccount": "serviceaccount",
}


class UnsupportedKindError(Exception):
    def __init__(self, kind, name):
        super().__init__(f"unsupported kind {kind} ({name})")
        self.kind = kind
        self.name = name


@dataclass
class BundleContents:
    deployments: list = field(default_factory=list)
    crds: list = field(default_factory=list)
    cluster_rules: list = field(default_factory=list)


def crd_file_name(crd):
    return f"{crd['spec']['names']['singular']}.{kind_map[crd['kind']]}.yaml"


def collect_manifests(documents, manifests_dir):
    """Sort manifest documents into the pieces of an OLM bundle.

    CRDs are written to manifests_dir as they are found. A kind that is
    neither handled nor explicitly ignored raises UnsupportedKindError.
    """
    contents = BundleContents()

    for doc in documents:
        if doc is None:
            continue
        kind = doc.get("kind")
        metadata = doc.get("metadata") or {}
        name = metadata.get("name")

        if kind in ignored_kinds:
            log.debug("Skipping %s %s", kind, name)
            continue

        # Bundle objects are cluster scoped
        metadata.pop("namespace", None)

        if kind in rbac_kinds:
            # Bindings have no rules, so only roles contribute
            if not (name or "").endswith(controller_suffix) or doc.get("rules") is None:
                log.debug("Skipping %s %s", kind, name)
                continue
            contents.cluster_rules.extend(doc["rules"])

        elif kind in deployment_kinds:
            if doc.get("spec") is None:
                log.debug("Skipping %s %s without spec", kind, name)
                continue
            deployment = {"name": name}
            if "labels" in metadata:
                deployment["label"] = metadata["labels"]
            deployment["spec"] = doc["spec"]
            contents.deployments.append(deployment)

        elif kind == "CustomResourceDefinition":
            contents.crds.append(doc)
            crd_pathn = os.path.join(manifests_dir, crd_file_name(doc))
            dump_manifest(crd_pathn, doc)
            log.info("Wrote %s", crd_pathn)

        else:
            raise UnsupportedKindError(kind, name)

    return contents
