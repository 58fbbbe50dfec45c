"""邮件中转基础设施模块"""
