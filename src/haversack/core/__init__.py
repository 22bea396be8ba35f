"""解析、建图与查询。"""
