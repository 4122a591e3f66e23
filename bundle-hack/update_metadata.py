import os

from manifests import dump_manifest


def make_dir(pathn):
    if not os.path.exists(pathn):
        os.makedirs(pathn)
    return pathn


# bundles/<version>/{manifests,metadata}
def make_bundle_dirs(bundles_dir, version):
    bundle_dir = make_dir(os.path.join(bundles_dir, version))
    manifests_dir = make_dir(os.path.join(bundle_dir, "manifests"))
    metadata_dir = make_dir(os.path.join(bundle_dir, "metadata"))
    return manifests_dir, metadata_dir


def write_annotations(annotations, metadata_dir):
    annotations_pathn = os.path.join(metadata_dir, "annotations.yaml")
    dump_manifest(annotations_pathn, annotations)
    return annotations_pathn
