#!/usr/bin/env python3

# Builds an OLM bundle for a release out of the rendered external-secrets
# manifests, the bundle annotations and a CSV template. Output goes to
# ./bundles/<version>/.

import argparse
import logging
import os
import sys

from collect_manifests import UnsupportedKindError, collect_manifests
from manifests import dump_manifest, load_manifest, load_manifests
from update_csv import csv_file_name, update_csv
from update_metadata import make_bundle_dirs, write_annotations

bundles_dir = "./bundles"
annotations_template = "./annotations.yaml"
csv_template = "./clusterserviceversion.yaml"


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("manifest_file", help="Multi-document manifest to bundle")
    parser.add_argument("version", help="Release version, e.g. v0.9.0")
    parser.add_argument("container_image", help="Controller image for the CSV")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    logging.info("Reading %s", args.manifest_file)
    documents = load_manifests(args.manifest_file)
    annotations = load_manifest(annotations_template)
    csv = load_manifest(csv_template)

    manifests_dir, metadata_dir = make_bundle_dirs(bundles_dir, args.version)
    logging.info("Generating bundle in %s", os.path.dirname(manifests_dir))

    try:
        contents = collect_manifests(documents, manifests_dir)
    except UnsupportedKindError as e:
        logging.warning(
            "UNSUPPORTED KIND - you must explicitly ignore it or handle it %s %s",
            e.kind,
            e.name,
        )
        sys.exit(1)

    write_annotations(annotations, metadata_dir)

    update_csv(csv, args.version, args.container_image, contents)
    csv_pathn = os.path.join(manifests_dir, csv_file_name(args.version))
    dump_manifest(csv_pathn, csv)
    logging.info("Wrote %s", csv_pathn)


if __name__ == "__main__":
    main()
