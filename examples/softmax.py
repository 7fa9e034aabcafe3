import numpy as np
from genfloat import FP32, FP64, from_f64, zero

A0 = np.random.rand(6) # Random array in the range [0,1)


def softmax(width):
    B0 = [from_f64(width, x) for x in A0] # Convert to the chosen width.

    # Find the max value.
    max_val = B0[0]
    for x in B0[1:]:
        max_val = max_val.max(x)

    # calculate exp(x-max) for each value, as e^(x-max).
    e = from_f64(width, np.e)
    shifted_exp = [e.powf(x - max_val) for x in B0]
    exp_sum = zero(width)
    for x in shifted_exp:
        exp_sum += x

    # calculate the softmax: [exp(x-max) / sum(exp(x-max))]
    return [x / exp_sum for x in shifted_exp]


print("Using fp32 arithmetic: ", softmax(FP32))
print("Using fp64 arithmetic: ", softmax(FP64))

# NumPy's softmax.
np_softmax  = np.exp(A0 - np.max(A0)) / np.exp(A0 - np.max(A0)).sum()
print("Reference = ", np_softmax)
