"""HTTP surface of the autoscaler broker"""
