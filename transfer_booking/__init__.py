"""Royal Transfer booking backend - contact and transfer requests"""
