"""
Receipt Points — receipt registry and reward-point scoring service.
"""
