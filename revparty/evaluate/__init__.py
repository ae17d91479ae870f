'''Evaluators determining the winners of an election.

Evaluators take either ranked (or graded) ballots or a duel matrix of
pairwise vote counts and return an ordered list of winner records.
'''
