from flask import Flask, request, jsonify

from config import CFG
from logs import get_logger
from notation import ConfigurationError, format_origin, parse_origin
from tour import TourStatus, origin_admissible, possibly_solvable, solve_tour

app = Flask(__name__)
logger = get_logger("app")


def read_board_args(data): # 解析请求中的棋盘尺寸与起点
    if not isinstance(data, dict):
        raise ConfigurationError('请求体必须是JSON对象')
    rows, cols = data.get('rows'), data.get('cols')
    if not isinstance(rows, int) or not isinstance(cols, int) or rows < 1 or cols < 1:
        raise ConfigurationError('rows 和 cols 必须是正整数')
    origin = data.get('origin')
    if origin is None:
        return rows, cols, None
    if not isinstance(origin, str):
        raise ConfigurationError('origin 必须是 a1 这样的棋盘坐标')
    return rows, cols, parse_origin(origin, rows, cols)


@app.errorhandler(ConfigurationError)
def bad_request(e): # 参数错误统一返回 400
    logger.info('rejected request to %s: %s', request.path, e)
    return jsonify({
        'success': False,
        'message': str(e)
    }), 400


@app.route('/api/feasible', methods=['POST'])
def feasible(): # 检查棋盘形状（和起点）是否可能有解
    rows, cols, origin = read_board_args(request.get_json(silent=True))
    check = possibly_solvable(rows, cols)
    if check and origin is not None:
        check = origin_admissible(rows, cols, *origin)

    return jsonify({
        'check': check,
        'message': f'{rows}x{cols} 棋盘可能有解' if check else f'{rows}x{cols} 棋盘无解'
    })


@app.route('/api/tour', methods=['POST'])
def tour(): # 从起点出发走完整个棋盘
    rows, cols, origin = read_board_args(request.get_json(silent=True))
    if origin is None:
        raise ConfigurationError('缺少起点 origin')

    result = solve_tour(rows, cols, origin)
    messages = {
        TourStatus.SOLVED: f'共走{len(result.path)}步',
        TourStatus.UNSOLVABLE: '此棋盘无解',
        TourStatus.TIMEOUT: '搜索超出预算',
    }
    return jsonify({
        'success': result.solved,
        'status': result.status.value,
        'board': result.ranks,
        'path': [format_origin(x, y, rows) for x, y in result.path],
        'message': messages[result.status]
    })


if __name__ == '__main__':
    app.run(host=CFG.HOST, port=CFG.PORT, debug=CFG.DEBUG)
