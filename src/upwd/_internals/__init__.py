# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""upwd internals.

Warning:
    Non-public package (implementation detail), provided for didactical
    and educational purposes only. Subject to change without notice,
    including removal.

"""

import upwd

__all__ = ()

PROG_NAME = upwd.__distribution_name__
VERSION = upwd.__version__
AUTHOR = upwd.__author__
