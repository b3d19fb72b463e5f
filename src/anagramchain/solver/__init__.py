"""Chain search over the anagram index: solver, enumerator and parallel survey."""
