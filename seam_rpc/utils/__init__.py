"""Stream helpers shared by the transports"""
