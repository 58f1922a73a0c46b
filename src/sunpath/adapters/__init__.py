# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Adapters implementing the SolarCalculator port."""
from sunpath.adapters.sequential_calculator import SequentialSolarCalculator
from sunpath.adapters.concurrent_calculator import ConcurrentSolarCalculator

__all__ = ["SequentialSolarCalculator", "ConcurrentSolarCalculator"]
