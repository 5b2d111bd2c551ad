"""Commerce microservices: inventory and product catalog"""
