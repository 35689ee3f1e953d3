"""
Module System Signals

Django signals for module lifecycle events.
"""

from django.dispatch import Signal

module_synced = Signal()       # After manifests were scanned into the module table
module_installed = Signal()    # When a module is installed for an account
module_uninstalled = Signal()  # When a module's code and data were removed
