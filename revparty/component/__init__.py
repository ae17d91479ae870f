'''Interchangeable components for evaluators.

Components are small named functions that parametrize evaluators, such as
the measure of a pairwise win used by the Condorcet evaluators. They are
registered by name so that evaluators can be configured by strings.
'''
