"""Service modules for the Discord bot."""
from .data_service import Book, BibleData, DataService, VerseRecord
from .provisioner import ProvisionReport, ServerProvisioner, run_provisioning_pass

__all__ = [
    'Book',
    'BibleData',
    'DataService',
    'VerseRecord',
    'ProvisionReport',
    'ServerProvisioner',
    'run_provisioning_pass'
]
