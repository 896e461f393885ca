# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Generate random passwords and report their entropy."""

__author__ = 'Marco Ricci <software@the13thletter.info>'
__distribution_name__ = 'upwd'

# Automatically generated.  DO NOT EDIT! Use importlib.metadata instead
# to query the correct values.
__version__ = '0.3.0'
# END automatically generated.
