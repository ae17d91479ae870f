'''Input/output of ballots and duel matrices in election file formats.

This subpackage is structured into modules by file format. Each format
module provides ``load``/``loads`` style functions to read from an open file
or a string and ``dump``/``dumps`` style functions to write back.
'''
