"""
desired_test provides tests for loading desired-state files.
"""
from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from caconfig.config.desired import DesiredState


class DesiredStateTest(unittest.TestCase):
    """
    DesiredStateTest provides tests for the DesiredState class.
    """
    def test_load_yaml(self) -> None:
        """
        test loading a YAML desired state with vars.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "desired.yml"
            path.write_text(
                "\n".join(
                    [
                        "vars:",
                        "  host: pki.contoso.com",
                        "settings:",
                        "  CRLPeriodUnits: 2",
                        "  CRLPeriod: Weeks",
                        "  CRLPublicationURLs:",
                        "    - '1:C:\\Windows\\system32\\CertSrv\\CertEnroll\\%3%8%9.crl'",
                        "    - '2:http://${host}/CertEnroll/%3%8%9.crl'",
                        "  AuditFilter: [StartAndStopADCS, ChangeCAConfiguration]",
                    ]
                ),
                encoding="utf-8",
            )
            desired = DesiredState.from_path(path)
            self.assertEqual(desired.settings["CRLPeriodUnits"], 2)
            self.assertEqual(desired.settings["CRLPeriod"], "Weeks")
            self.assertEqual(
                desired.settings["CRLPublicationURLs"],
                [
                    "1:C:\\Windows\\system32\\CertSrv\\CertEnroll\\%3%8%9.crl",
                    "2:http://pki.contoso.com/CertEnroll/%3%8%9.crl",
                ],
            )
            self.assertNotIn("DSConfigDN", desired.settings)

    def test_empty_settings(self) -> None:
        self.assertEqual(DesiredState().settings, {})
        self.assertEqual(DesiredState.model_validate({}).settings, {})

    def test_null_value_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            DesiredState.model_validate({"settings": {"CRLPeriod": None}})

    def test_unknown_top_level_key_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            DesiredState.model_validate({"setting": {}})


if __name__ == "__main__":
    unittest.main()
