"""core/trace.py - 步骤记录与结果模型"""
from enum import Enum
from typing import NamedTuple, Tuple, Union

import pandas as pd

from config.config import ENGINE_CONFIG
from core.operators import format_number


class TraceKind(Enum):
    TOKEN = "token"  # 处理了一个输入字符
    MARKER = "marker"  # 预处理/收尾阶段的合成步骤


MARKER_EOF = ENGINE_CONFIG["marker_eof"]
MARKER_REVERSE = ENGINE_CONFIG["marker_reverse"]
MARKER_FINAL = ENGINE_CONFIG["marker_final"]
MARKER_TOKENS = (MARKER_EOF, MARKER_REVERSE, MARKER_FINAL)


class Step(NamedTuple):
    """转换算法的一步：token、栈快照（栈底到栈顶）、当前输出、动作说明"""
    token: str
    stack: Tuple[str, ...]
    output: str
    action: str
    kind: TraceKind = TraceKind.TOKEN

    def to_dict(self):
        return {
            'token': self.token,
            'stack': list(self.stack),
            'output': self.output,
            'action': self.action,
            'kind': self.kind.value,
        }


class EvaluationStep(NamedTuple):
    """求值算法的一步，没有output字段，部分结果就是栈顶"""
    token: str
    stack: Tuple[float, ...]
    action: str
    kind: TraceKind = TraceKind.TOKEN

    def to_dict(self):
        return {
            'token': self.token,
            'stack': list(self.stack),
            'action': self.action,
            'kind': self.kind.value,
        }


def marker_step(token, output, action):
    """REVERSE / EOF / FINAL 这类合成步骤"""
    return Step(token, (), output, action, TraceKind.MARKER)


class AlgorithmResult(NamedTuple):
    steps: Tuple[Union[Step, EvaluationStep], ...]
    result: Union[str, float]

    @property
    def is_evaluation(self):
        return not isinstance(self.result, str)

    def to_dict(self):
        return {
            'steps': [s.to_dict() for s in self.steps],
            'result': self.result,
        }

    def to_frame(self):
        """步骤表，每步一行，供展示或导出CSV"""
        if self.is_evaluation:
            columns = ['token', 'stack', 'action', 'kind']
        else:
            columns = ['token', 'stack', 'output', 'action', 'kind']
        rows = []
        for step in self.steps:
            row = step.to_dict()
            row['stack'] = ' '.join(_format_item(x) for x in step.stack)
            rows.append(row)
        df = pd.DataFrame(rows, columns=columns)
        df.index.name = 'step'
        return df


def _format_item(item):
    if isinstance(item, str):
        return item
    return format_number(item)
