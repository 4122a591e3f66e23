import re

# Set common variables
operator_name = "external-secrets"
min_kube_version = "1.18.0"
maturity = "stable"


# A "v" prefix is not valid in a CSV version, see:
# https://github.com/operator-framework/operator-sdk/issues/5342
def csv_version(version):
    return re.sub(r"^v", "", version)


def csv_name(version):
    return f"{operator_name}.v{csv_version(version)}"


def csv_file_name(version):
    return f"{csv_name(version)}.clusterserviceversion.yaml"


def owned_crds(crds):
    owned = []
    for crd in crds:
        kind = crd["spec"]["names"].get("kind", crd["kind"])
        for v in crd["spec"]["versions"]:
            owned.append(
                {
                    "name": crd["metadata"]["name"],
                    "displayName": kind,
                    "kind": kind,
                    "version": v["name"],
                    "description": kind,
                }
            )
    return owned


def update_csv(csv, version, image, contents):
    install_spec = csv["spec"]["install"]["spec"]
    install_spec["deployments"] = contents.deployments
    install_spec["clusterPermissions"][0]["rules"] = contents.cluster_rules

    csv["metadata"]["name"] = csv_name(version)
    csv["metadata"]["annotations"]["containerImage"] = image

    csv["spec"]["version"] = csv_version(version)
    csv["spec"]["minKubeVersion"] = min_kube_version
    csv["spec"]["maturity"] = maturity

    crd_spec = csv["spec"].setdefault("customresourcedefinitions", {})
    crd_spec["owned"] = owned_crds(contents.crds)

    return csv
