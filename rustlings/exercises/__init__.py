"""Worked solutions: errors, basics, language, iterators and concurrency."""