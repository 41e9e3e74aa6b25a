""" Happy numbers: the cycle detector (happy.happy) plus some numpy/matplotlib tools to look at them. """
