"""SimPy environment, processes and runner"""
