"""Worked answers to a selection of the course exercises."""