"""Numeric types accepted for transform parameters"""
import numpy as np

INTEGER_TYPES = (int, np.integer)
NUMBER_TYPES = (int, float, np.integer, np.floating)
BOOL_TYPES = (bool, np.bool_)
