"""数据模型。"""
