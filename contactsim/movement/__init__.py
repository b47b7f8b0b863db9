"""Host mobility models"""
