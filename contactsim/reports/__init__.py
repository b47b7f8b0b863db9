"""Contact bookkeeping and the connections report"""
