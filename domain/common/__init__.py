"""领域公共组件"""
