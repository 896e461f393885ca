# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib
"""Run [`upwd.cli.upwd`][] on import."""

import sys

if __name__ == '__main__':
    from upwd.cli import upwd

    sys.exit(upwd())
