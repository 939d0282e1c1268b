from appyratus.json import JsonEncoder as BaseJsonEncoder

from graphql import ExecutionResult, GraphQLError


class JsonEncoder(BaseJsonEncoder):
    def default(self, target):
        if isinstance(target, (ExecutionResult, GraphQLError)):
            return target.formatted
        else:
            return super().default(target)
