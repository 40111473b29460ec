"""
Concrete AdvisoryGateway implementations.
"""
