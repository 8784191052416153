from typing import Any, Dict, Optional, Union, List


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    code: int = 200,
    msg: str = "操作成功",
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        data: 响应数据，可以是任何类型
        code: 响应状态码，默认200表示成功
        msg: 响应消息

    返回:
        Dict[str, Any]: 标准格式的响应对象
    """
    return {
        "code": code,
        "data": data,
        "msg": msg,
    }


def success_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    msg: str = "操作成功",
) -> Dict[str, Any]:
    """
    创建成功响应
    """
    return standard_response(data=data, code=200, msg=msg)


def error_response(
    msg: str = "操作失败",
    code: int = 400,
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> Dict[str, Any]:
    """
    创建错误响应

    参数:
        msg: 错误消息
        code: 错误状态码，默认400表示客户端错误
        data: 可选的错误详情数据
    """
    return standard_response(data=data, code=code, msg=msg)


def not_found_response(msg: str) -> Dict[str, Any]:
    """
    按ID查找失败的响应

    查找失败属于客户端参数错误，统一使用400
    """
    return error_response(msg=msg, code=400)


def server_error_response(msg: str = "服务器内部错误") -> Dict[str, Any]:
    """
    创建服务器错误响应
    """
    return error_response(msg=msg, code=500)
