# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Pure coverage computation: no I/O, no third-party deps beyond numpy."""
