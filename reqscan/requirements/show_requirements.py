# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

from typing import Any, Optional

from packageurl import PackageURL
from packaging.requirements import Requirement
from packaging.utils import canonicalize_name

import reqscan
from reqscan.common.print import print_text
from reqscan.common.script_base import ScriptBase

LOG = reqscan.get_logger(__name__)


class ShowRequirements(ScriptBase):
    """Show the requirements of a requirements file."""

    @staticmethod
    def get_pinned_version(req: Requirement) -> Optional[str]:
        """Return the version of a requirement pinned with ``==``, otherwise None."""
        specs = list(req.specifier)
        if len(specs) != 1:
            return None

        spec = specs[0]
        if spec.operator not in ("==", "===") or "*" in spec.version:
            return None

        return spec.version

    @staticmethod
    def generate_purl(name: str, version: str) -> str:
        """
        Generate the package URL for the PyPI package identified by
        the given name and version.
        For details see https://github.com/package-url/purl-spec
        """
        return PackageURL("pypi", None, canonicalize_name(name), version).to_string()

    def format_requirement(self, req: Requirement) -> str:
        text = "  " + req.name
        if req.extras:
            text += "[" + ",".join(sorted(req.extras)) + "]"
        if req.url:
            text += " @ " + req.url
        elif req.specifier:
            text += ", " + str(req.specifier)
        else:
            text += ", (no version)"
        if req.marker:
            text += "; " + str(req.marker)
        return text

    def print_requirements(self, requirements: Any) -> None:
        print_text("Requirements:")
        for req in requirements:
            print_text(self.format_requirement(req))
            if not self.verbose:
                continue

            version = self.get_pinned_version(req)
            if version:
                print_text("    " + self.generate_purl(req.name, version))
            else:
                LOG.debug(f"    {req.name} is not pinned to a specific version")

    def run(self, args: Any) -> None:
        """Main method()"""
        if args.debug:
            global LOG
            LOG = reqscan.get_logger(__name__)

        print_text("\n" + reqscan.get_app_signature() + " - Show requirements\n")

        if args.help:
            print("usage: reqscan show [-i INPUTFILE] [-v]")
            print("")
            print("Show the requirements of a requirements file")
            print("")
            print("optional arguments:")
            print("    -h, --help            show this help message and exit")
            print("    -i INPUTFILE, --inputfile INPUTFILE")
            print("                            input file (requirements.txt)")
            print("    -v                    verbose output, show package URLs")
            return

        self.verbose = args.verbose
        requirements = self.read_requirements(args)
        self.print_requirements(requirements)

        print_text("\n" + self.get_count_text(requirements) + " found.")
        print()
