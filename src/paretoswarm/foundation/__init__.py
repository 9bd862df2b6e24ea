"""
Foundation layer: errors, logging, kernels, objective functions, evaluation and persistence.
"""
