"""
Schedule Allocations Admin
Streamlit administration surface for professor/course schedule allocations.
"""

__version__ = '1.0.0'
